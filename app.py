"""
Manual Therapy Clinic Website
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the clinic package.
"""

import os

from clinic import create_app
from clinic.config import Config, ProductionConfig

# Create the Flask application using the factory
app = create_app(ProductionConfig if Config.IS_PRODUCTION else Config)

if __name__ == '__main__':
    app.run(debug=not Config.IS_PRODUCTION, host='0.0.0.0', port=int(os.environ.get('PORT', '5000')))
