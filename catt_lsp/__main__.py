from catt_lsp.server import main

main()
