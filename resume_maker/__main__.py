import sys

from resume_maker.main import main

sys.exit(main())
