"""Run the five-words solver with `python -m fivewords`."""

from fivewords import main

main()
