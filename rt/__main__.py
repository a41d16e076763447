from rt.cli.app import main

main()
