import uvicorn
import webbrowser
import threading
import time


def open_browser():
    time.sleep(2)  # Wait for server to start
    webbrowser.open("http://localhost:8000/docs")


if __name__ == "__main__":
    # Launch browser in a separate thread
    threading.Thread(target=open_browser).start()

    # workers=1: the app object is passed directly
    from main import app
    uvicorn.run(app, host="0.0.0.0", port=8000, workers=1)
