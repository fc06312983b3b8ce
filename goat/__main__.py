from goat.cli import main

main()
