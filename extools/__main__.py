from extools.cli.app import main

main()
