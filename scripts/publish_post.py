# Publish post 1 in a separate run from the seed
from orm_demo.runner import cli_publish

if __name__ == "__main__":
    cli_publish()
