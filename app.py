import os
from flask import Flask
from loguru import logger

from views.pokedex import bp as pokedex_bp
from services import core
from services.session import PokedexController


def create_app(controller=None, autoload=True):
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config['POKEDEX_AUTOLOAD'] = autoload

    app.extensions['pokedex'] = controller or PokedexController(core.ROSTER_SIZE)
    app.register_blueprint(pokedex_bp)

    # Roster loads once, in the background, on the first incoming request
    @app.before_request
    def _schedule_roster_load():
        if app.config['POKEDEX_AUTOLOAD'] and not app.config.get('POKEDEX_LOAD_SCHEDULED'):
            app.config['POKEDEX_LOAD_SCHEDULED'] = True
            logger.info("Scheduling roster load")
            core.EXECUTOR.submit(app.extensions['pokedex'].load)

    return app


app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=True)
