"""Allow ``python -m go_safe_enum_generator``."""

from .main import main

main()
