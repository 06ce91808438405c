import os
from app import create_app
from app.config import config

app = create_app(config[os.getenv('APP_ENV', 'default')])

if __name__ == '__main__':
    port = int(os.getenv('PORT', 3001))
    app.logger.info(f'Server now on port {port}')
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
