from justmyluck.main import app, run  # noqa: F401

if __name__ == "__main__":
    run()
