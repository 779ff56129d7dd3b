from src.school_attendance.school_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    # Reloader would start a second scheduler in the child process.
    app.run(debug=app.config["DEBUG"], use_reloader=False)
