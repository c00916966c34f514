from eventhub import create_app
from eventhub.extensions import close_mongo

app = create_app()

if __name__ == "__main__":
    print("\n" + "="*50)
    print(f"STARTING SERVER ON {app.config['HOST']}:{app.config['PORT']}")
    print("="*50 + "\n")
    try:
        app.run(host=app.config['HOST'], port=app.config['PORT'], threaded=True)
    finally:
        close_mongo(app)
