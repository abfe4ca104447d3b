from cnbrates.app import main

main()
