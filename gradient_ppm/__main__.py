import sys

from gradient_ppm.emit_gradient import main

sys.exit(main())
