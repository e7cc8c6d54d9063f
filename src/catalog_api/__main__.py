from catalog_api.cli import main

main()
