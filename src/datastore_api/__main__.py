from datastore_api.api.app import main

main()
