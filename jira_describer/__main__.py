from jira_describer.cli.main import app

app(prog_name="jira-describer")
