from axe_scanner_mcp.cli import main

main()
