import os

from dotenv import load_dotenv

# Load environment variables before the config module reads them
load_dotenv()

from app import create_app  # noqa: E402

# Create app instance
app = create_app()


if __name__ == '__main__':
    app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 5000)),
        debug=os.getenv('DEBUG', 'False') == 'True'
    )
