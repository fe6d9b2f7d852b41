from percentq.cli import main

main()
