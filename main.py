"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It initializes all services and starts the Flask-SocketIO application.
"""

from daily_wordle import create_app
from daily_wordle.config import Config, WORD_LIST, validate_word_list_integrity
from daily_wordle.services.scheduler import SocketIOScheduler
from daily_wordle.services.scoring_service import initialize_scoring_service
from daily_wordle.services.session_service import initialize_session_service
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        validate_word_list_integrity()
        print(f"✓ Word list validated ({len(WORD_LIST)} words)")
        
        # Initialize in-process scoring service
        scoring_service = initialize_scoring_service(WORD_LIST, Config.FIRST_WORD_DATE)
        print(f"✓ Scoring service initialized (puzzle #{scoring_service.puzzle_id})")
        
        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")
        
        # Initialize session service with socket-aware timers
        initialize_session_service(Config, scheduler=SocketIOScheduler(socketio))
        print(f"✓ Session service initialized ({Config.PERSISTENCE_BACKEND} persistence)")
        
        game_logger.logger.info(
            f"Daily Wordle Server starting - puzzle #{scoring_service.puzzle_id}, "
            f"first word date {Config.FIRST_WORD_DATE}"
        )
        
        print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
