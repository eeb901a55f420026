"""Script entrypoint: starts the responder via service2.server.main."""
from service2.server import main

if __name__ == "__main__":
    main()
