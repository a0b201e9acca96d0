"""Entry point for ``python -m hullview``."""
from hullview.main import main

main()
