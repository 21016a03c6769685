import sys

from racingcar.cli import main

sys.exit(main())
