from grid_games.cli import main

main()
