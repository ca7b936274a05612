"""Entry point for running weather as a module: python -m weather <location>"""

from weather.cli import entrypoint

if __name__ == "__main__":
    entrypoint()
