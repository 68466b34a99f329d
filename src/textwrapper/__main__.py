from textwrapper.cli import main

main()
