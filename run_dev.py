#!/usr/bin/env python3
"""Development server runner for the Tuskers API."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv


def setup_environment():
    """Set up the development environment."""
    project_root = Path(__file__).parent
    sys.path.insert(0, str(project_root))

    env_file = project_root / '.env'
    if env_file.exists():
        load_dotenv(env_file)
        print(f"✓ Loaded environment from {env_file}")
    else:
        print(f"⚠️ No .env file found at {env_file}")

    os.environ.setdefault('FLASK_APP', 'tuskers')
    os.environ.setdefault('FLASK_DEBUG', '1')
    # Without migrations applied, let the factory create the tables
    os.environ.setdefault('AUTO_CREATE_TABLES', '1')


def run_development_server():
    """Run the Flask development server."""
    from tuskers import create_app

    app = create_app()

    print("\n" + "="*60)
    print("🏏 Starting Tuskers API Development Server")
    print("="*60)
    print(f"Database: {app.config['SQLALCHEMY_DATABASE_URI']}")
    print("\n📱 API available at:")
    print("   • http://localhost:5000/api")
    print("\n🛠️ To create an admin account, run in another terminal:")
    print("   flask --app tuskers user create --username admin --password 'ChangeMe123'")
    print("\n⏹️ Press Ctrl+C to stop the server")
    print("="*60)

    app.run(
        host='0.0.0.0',
        port=5000,
        debug=True,
        use_reloader=True
    )


def main():
    """Main function to set up and run the development server."""
    print("Tuskers Cricket Club API - Development Setup")
    print("="*60)

    setup_environment()

    try:
        run_development_server()
    except KeyboardInterrupt:
        print("\n\n🛑 Development server stopped by user")


if __name__ == "__main__":
    main()
