from shapebridge.cli import main

main()
