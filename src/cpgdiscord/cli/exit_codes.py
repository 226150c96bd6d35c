"""Standard exit codes for the CpGDiscord CLI.

Shell conventions: 0 success, 1 run failure (bad input, unreadable BAM,
unwritable output), 2 usage error, 128 + signal number when interrupted.
"""

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_SIGINT = 130  # 128 + SIGINT(2)
EXIT_SIGTERM = 143  # 128 + SIGTERM(15)
