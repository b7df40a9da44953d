"""Allow running the application as: python -m mega."""

from mega.runner import main

main()
