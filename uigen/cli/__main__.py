"""Entry point for the uigen CLI when run as python -m uigen.cli."""

if __name__ == "__main__":
    from uigen.cli.main import main

    main()
