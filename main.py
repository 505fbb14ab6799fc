"""
Word Game Server - Main Entry Point

This is the main entry point for the word game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

import os
from wordgame import create_app
from wordgame.config import config
from wordgame.services.game_service import initialize_game_service
from wordgame.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])
    
    try:
        print("Initializing services...")
        
        game_service = initialize_game_service(config_class)
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")
        
        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info(
            f"Word Game Server starting - word length {config_class.WORD_LENGTH}, "
            f"{config_class.MAX_ROWS} rows, {config_class.MAX_HINTS} hints"
        )
        
        print(f"\nStarting Word Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Answer source: {config_class.ANSWER_API_URL}")
        print("=" * 50)
        
        # Start the server
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
