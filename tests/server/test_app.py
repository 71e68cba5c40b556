"""Tests for the HTTP surface."""

from unittest.mock import MagicMock

import pytest

from lanzo.core.provisioner import Provisioner
from lanzo.models.container import RunningContainer
from lanzo.server.app import make_app
from lanzo.services.exceptions import (
    ContainerNotFoundError,
    EngineUnreachableError,
    InvalidProvisioningTargetError,
    ProvisioningFailedError,
    RemovalFailedError,
    UnknownServiceError,
)
from lanzo.version import __version__


@pytest.fixture
def mock_orchestrator():
    orchestrator = MagicMock()
    orchestrator.run_service.return_value = RunningContainer(service="localstack", id="abc123", name="localstack")
    orchestrator.get_port_mapping.return_value = {"4566/tcp": [{"HostIp": "0.0.0.0", "HostPort": "4566"}]}
    return orchestrator


@pytest.fixture
def mock_provisioner():
    return MagicMock(spec=Provisioner)


@pytest.fixture
async def client(aiohttp_client, mock_orchestrator, mock_provisioner):
    return await aiohttp_client(make_app(mock_orchestrator, mock_provisioner))


async def test_healthcheck(client):
    resp = await client.get('/health')

    assert resp.status == 200
    assert await resp.json() == {'status': 'ok', 'version': __version__}


class TestRunService:

    async def test_run_with_target_host(self, client, mock_orchestrator):
        resp = await client.post('/localstack', json={'targetHost': '10.0.0.5'})

        assert resp.status == 200
        assert await resp.json() == {
            'message': 'Container(s) for localstack started successfully',
            'containers': {'service': 'localstack', 'id': 'abc123', 'name': 'localstack'},
        }
        mock_orchestrator.run_service.assert_called_once_with('localstack', '10.0.0.5')

    async def test_ip_alias(self, client, mock_orchestrator):
        await client.post('/localstack', json={'ip': '10.0.0.6'})

        mock_orchestrator.run_service.assert_called_once_with('localstack', '10.0.0.6')

    async def test_no_body_means_local_engine(self, client, mock_orchestrator):
        resp = await client.post('/localstack')

        assert resp.status == 200
        mock_orchestrator.run_service.assert_called_once_with('localstack', None)

    async def test_empty_target_host_means_local_engine(self, client, mock_orchestrator):
        await client.post('/localstack', json={'targetHost': ''})

        mock_orchestrator.run_service.assert_called_once_with('localstack', None)

    async def test_stack_result_is_list(self, client, mock_orchestrator):
        mock_orchestrator.run_service.return_value = [
            RunningContainer(service="db-wordpress", id="1", name="db-wordpress"),
            RunningContainer(service="wordpress", id="2", name="wordpress"),
        ]

        resp = await client.post('/wordpressstack')

        body = await resp.json()
        assert [c['service'] for c in body['containers']] == ['db-wordpress', 'wordpress']

    async def test_invalid_json(self, client, mock_orchestrator):
        resp = await client.post('/localstack', data='{not json', headers={'Content-Type': 'application/json'})

        assert resp.status == 400
        assert (await resp.json())['type'] == 'BadRequest'
        mock_orchestrator.run_service.assert_not_called()

    async def test_unknown_service(self, client, mock_orchestrator):
        mock_orchestrator.run_service.side_effect = UnknownServiceError('nginx')

        resp = await client.post('/nginx')

        assert resp.status == 404
        assert await resp.json() == {'error': "Unsupported service: 'nginx'", 'type': 'UnknownServiceError'}

    async def test_engine_unreachable(self, client, mock_orchestrator):
        mock_orchestrator.run_service.side_effect = EngineUnreachableError('Cannot reach container engine')

        resp = await client.post('/localstack', json={'targetHost': '10.0.0.99'})

        assert resp.status == 502
        assert (await resp.json())['type'] == 'EngineUnreachableError'


class TestStopService:

    async def test_stop(self, client, mock_orchestrator):
        resp = await client.delete('/localstack', json={'targetHost': '10.0.0.5'})

        assert resp.status == 200
        assert (await resp.json())['message'] == 'Container(s) for localstack stopped and removed successfully'
        mock_orchestrator.stop_service.assert_called_once_with('localstack', '10.0.0.5')

    async def test_stop_failure(self, client, mock_orchestrator):
        mock_orchestrator.stop_service.side_effect = RemovalFailedError('removal already in progress')

        resp = await client.delete('/localstack')

        assert resp.status == 500
        assert await resp.json() == {'error': 'removal already in progress', 'type': 'RemovalFailedError'}


class TestPortMapping:

    async def test_ports(self, client, mock_orchestrator):
        resp = await client.get('/localstack/port', params={'targetHost': '10.0.0.5'})

        assert resp.status == 200
        assert await resp.json() == {
            'message': 'Mapped ports for localstack',
            'ports': {'4566/tcp': [{'HostIp': '0.0.0.0', 'HostPort': '4566'}]},
        }
        mock_orchestrator.get_port_mapping.assert_called_once_with('localstack', '10.0.0.5')

    async def test_ports_without_query(self, client, mock_orchestrator):
        await client.get('/localstack/port')

        mock_orchestrator.get_port_mapping.assert_called_once_with('localstack', None)

    async def test_ports_container_missing(self, client, mock_orchestrator):
        mock_orchestrator.get_port_mapping.side_effect = ContainerNotFoundError("Container 'localstack' not found")

        resp = await client.get('/localstack/port')

        assert resp.status == 404


class TestProvisioning:

    async def test_deploy(self, client, mock_provisioner):
        mock_provisioner.deploy.return_value = {'init': 'initialized', 'apply': 'Apply complete!'}

        resp = await client.post('/deploy/s3-bucket')

        assert resp.status == 200
        assert await resp.json() == {
            'message': 'Deployment completed successfully',
            'outputs': {'init': 'initialized', 'apply': 'Apply complete!'},
        }
        mock_provisioner.deploy.assert_called_once_with('s3-bucket')

    async def test_deploy_missing_directory(self, client, mock_provisioner):
        mock_provisioner.deploy.side_effect = InvalidProvisioningTargetError("Invalid or missing provisioning directory: 'vpc'")

        resp = await client.post('/deploy/vpc')

        assert resp.status == 400

    async def test_deploy_failure(self, client, mock_provisioner):
        mock_provisioner.deploy.side_effect = ProvisioningFailedError('apply', 1, 'Error: access denied')

        resp = await client.post('/deploy/s3-bucket')

        assert resp.status == 500
        body = await resp.json()
        assert body['type'] == 'ProvisioningFailedError'
        assert 'access denied' in body['error']

    async def test_destroy(self, client, mock_provisioner):
        mock_provisioner.destroy.return_value = 'Destroy complete!'

        resp = await client.post('/destroy/s3-bucket')

        assert resp.status == 200
        assert await resp.json() == {'message': 'Resources destroyed successfully', 'output': 'Destroy complete!'}


class TestWithOrchestrator:
    """Requests flowing through a real orchestrator over an in-memory engine."""

    @pytest.fixture
    async def live_client(self, aiohttp_client, orchestrator, mock_provisioner):
        return await aiohttp_client(make_app(orchestrator, mock_provisioner))

    async def test_stack_lifecycle(self, live_client, engine, resolver):
        resp = await live_client.post('/wordpressstack', json={'targetHost': '10.0.0.5'})
        assert resp.status == 200
        assert [c['name'] for c in (await resp.json())['containers']] == ['db-wordpress', 'wordpress']

        resp = await live_client.get('/wordpressstack/port', params={'targetHost': '10.0.0.5'})
        assert (await resp.json())['ports'] == {
            'db-wordpress': {},
            'wordpress': {'80/tcp': [{'HostIp': '', 'HostPort': '8000'}]},
        }

        resp = await live_client.delete('/wordpressstack', json={'targetHost': '10.0.0.5'})
        assert resp.status == 200
        assert engine.containers == {}
        assert resolver.hosts == ['10.0.0.5', '10.0.0.5', '10.0.0.5']

    async def test_unknown_service_never_reaches_engine(self, live_client, engine):
        resp = await live_client.post('/nginx')

        assert resp.status == 404
        assert engine.calls == []

    async def test_ports_of_absent_service(self, live_client):
        resp = await live_client.get('/localstack/port')

        assert resp.status == 404
        assert (await resp.json())['type'] == 'ContainerNotFoundError'
