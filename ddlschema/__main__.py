# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

import sys

from ddlschema.cli import main

if __name__ == "__main__":
    sys.exit(main())
