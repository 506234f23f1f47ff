from specref.app import main

main()
