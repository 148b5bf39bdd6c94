from pix_residencial import create_app
import os


def main():
    app = create_app()
    porta = int(os.environ.get('PIX_PORTA', 5005))

    app.run(debug=False, port=porta, use_reloader=False)


if __name__ == '__main__':
    main()
