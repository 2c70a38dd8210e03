"""Application constants for gnomit."""

PROGRAM_NAME = "Gnomit"
APPLICATION_NAME = "Gnomit Commit Editor"

SUMMARY = """Helps you write better Git commit messages.

To use, configure Git to use Gnomit as the default editor:

  git config --global core.editor <path-to-gnomit>"""

COPYRIGHT = """Copyright (C) 2018 Aral Balkan (https://ar.al)
Copyright (C) 2018 Ind.ie (https://ind.ie)

License GPLv3+: GNU GPL version 3 or later (http://gnu.org/licenses/gpl.html)
This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law."""

# Foreground colour of the instructional comment block
DEFAULT_COMMENT_COLOR = "#959595"

# Zero-based line of the comment block that carries the current branch
BRANCH_LINE_INDEX = 5

READ_ERROR_SUMMARY = "Error: Could not read the Git commit message file."
WRITE_ERROR_SUMMARY = "Error: Could not save the Git commit message file."
INSTALLATION_ERROR_SUMMARY = "Error: failed to set Gnomit as your default Git editor."
GIT_INSTALL_HELP = (
    "Git is not installed.\n\n"
    "For help on installing Git, please see:\n"
    "https://git-scm.com/book/en/v2/Getting-Started-Installing-Git"
)
