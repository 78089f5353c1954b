"""
Wordle Chain Server - Main Entry Point

This is the main entry point for the Wordle chain server.
It runs the one-time proof backend setup, initializes the game service and
starts the Flask application.
"""

from wordle_chain import create_app
from wordle_chain.config import get_config
from wordle_chain.exceptions import SetupError
from wordle_chain.services import build_game_service
from wordle_chain.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = get_config()
    try:
        # Setup must finish before any proof is produced or verified
        print("Compiling proof backend...")
        build_game_service(config_class)
        print("✓ Proof backend ready, game service initialized")

        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Chain Server Starting")

        print(f"\nStarting Wordle Chain Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Chain Server shutting down (KeyboardInterrupt)")
    except SetupError as e:
        print(f"Proof backend setup failed: {e}")
        game_logger.logger.error(f"Proof backend setup failed: {e}")
        raise


if __name__ == '__main__':
    main()
