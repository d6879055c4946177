from etherscan_mcp.stdio_server import main

main()
