from todo_mcp.main import run

run()
