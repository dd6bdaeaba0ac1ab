from libsearch.main import run

run()
