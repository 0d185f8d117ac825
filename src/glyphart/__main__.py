from glyphart.cli import main

main()
