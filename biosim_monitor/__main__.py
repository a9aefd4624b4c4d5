from biosim_monitor.main import cli

if __name__ == "__main__":
    cli()
