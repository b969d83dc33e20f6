"""
Dueto Game Server - Main Entry Point

This is the main entry point for the Dueto game server.
It initializes all services and starts the Flask-SocketIO application.
"""

from dueto import create_app
from dueto.config import get_config
from dueto.services.game_service import initialize_game_service
from dueto.services.ranking_service import initialize_ranking_service
from dueto.services.storage import build_state_store
from dueto.services.word_source import build_word_source
from dueto.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        config_class = get_config()
        print(f"Initializing services ({config_class.__name__})...")

        store = build_state_store(config_class)
        print(f"✓ State store ready ({type(store).__name__})")

        word_source = build_word_source(config_class)
        print(f"✓ Word source ready ({type(word_source).__name__})")

        game_service = initialize_game_service(word_source, store)
        print(f"✓ Game service initialized (round at row {game_service.round.current_row})")

        initialize_ranking_service(store)
        print("✓ Ranking service initialized")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Dueto Server Starting")

        print(f"\nStarting Dueto Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Dueto Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
