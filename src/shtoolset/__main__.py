from shtoolset.main import run

run()
