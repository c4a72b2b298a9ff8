# Seed example
from orm_demo.runner import cli

if __name__ == "__main__":
    cli()
