from wordgame import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # SocketIO's dev server handles each request on its own thread
    socketio.run(app, debug=True)
