from pendulumwave.cli import main

main()
