# ASH Music Festival guide bot
