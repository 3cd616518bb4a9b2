from plaidkit.cli import main

main()
