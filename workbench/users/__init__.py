"""A layered user service on SQLite: models, repositories, transactions, use cases and a Flask app."""