from timeserver.main import run

run()
