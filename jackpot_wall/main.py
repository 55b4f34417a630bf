from jackpot_wall.application import create_app

# Entry point for `uvicorn jackpot_wall.main:app`; settings come from the environment
app = create_app()
