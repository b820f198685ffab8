from repohunt.cli import main

main()
