import sys

from recordstore.demo import main

sys.exit(main(sys.argv[1:]))
