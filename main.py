from lore_parser.play import main

if __name__ == "__main__":
    main()
