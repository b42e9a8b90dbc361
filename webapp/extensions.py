from flask_mailman import Mail

mail = Mail()
