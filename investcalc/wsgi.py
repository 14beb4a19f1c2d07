#setup: pip install -e ".[test]"
#setup: flask --app investcalc.wsgi run --port 5000 --debug

from investcalc.app import create_app

app = create_app()


def main() -> None:
    app.run(port=5000, debug=True)


if __name__ == "__main__":
    main()
