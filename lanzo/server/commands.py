HEALTHCHECK_PATH = '/health'
DEPLOY_PATH = '/deploy/{service}'
DESTROY_PATH = '/destroy/{service}'
SERVICE_PATH = '/{service}'
SERVICE_PORT_PATH = '/{service}/port'
