from jobcharts.cli.main import main

main()
