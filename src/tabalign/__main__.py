from tabalign.cli.main import main

main()
