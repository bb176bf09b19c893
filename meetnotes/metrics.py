from meetnotes.env import enable_metrics
from meetnotes.modules.monitoring import instrumentator
from meetnotes.utils import create_app

metrics = create_app()

if enable_metrics:

    @metrics.get('/healthz')
    def health():
        '''
        Health checking.
        '''

        return {'status': 'ok'}

    # requests to the API app are instrumented in meetnotes.apps.api
    instrumentator.expose(metrics)
