"""Entry point for running asset-hasher as a module: python -m asset_hasher.

This enables:
    python -m asset_hasher hash public/css public/js --base public
    python -m asset_hasher hashers
"""

from asset_hasher.api.cli.main import main

if __name__ == "__main__":
    main()
