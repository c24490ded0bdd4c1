from mac_dev_tools_check.cli import cli

if __name__ == "__main__":
    cli(prog_name="validate-tools")
