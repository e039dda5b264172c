from cidfiller.main import run

run()
