# Exit codes for the chk CLI (stable; scripts branch on them)
OK = 0
INVALID = 1
USER_ERR = 2
