from toprompt.cli import main

main()
