from src.checkin_system.checkin_system.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=app.config.get("HOST", "127.0.0.1"), port=int(app.config.get("PORT", 3000)), debug=app.config.get("DEBUG", False))
