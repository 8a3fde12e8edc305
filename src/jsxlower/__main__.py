from jsxlower.cli import main

main()
