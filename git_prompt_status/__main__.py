import sys

from git_prompt_status.cli.main import main

sys.exit(main())
