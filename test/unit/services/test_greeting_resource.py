from unittest.mock import MagicMock

import pytest

from greeting_endpoint.domain.greeting import Greeting
from greeting_endpoint.services.greeting_resource import GreetingResource
from greeting_endpoint.services.greeting_service import GreetingService


@pytest.fixture
def resource():
    return GreetingResource(GreetingService(prefix='Hello '), seed_names=['Apple', 'Pineapple'])


def test_list_returns_seed_greetings_in_order(resource):
    assert resource.list() == [Greeting(name='Apple'), Greeting(name='Pineapple')]


def test_list_defaults_to_configured_seeds():
    resource = GreetingResource(GreetingService())

    assert [g.name for g in resource.list()] == ['Apple', 'Pineapple']


def test_duplicate_seeds_are_stored_once():
    resource = GreetingResource(MagicMock(), seed_names=['Apple', 'Pineapple', 'Apple'])

    assert [g.name for g in resource.list()] == ['Apple', 'Pineapple']


def test_add_ignores_known_names(resource):
    assert resource.add(Greeting(name='Banana'))
    assert not resource.add(Greeting(name='Apple'))

    assert [g.name for g in resource.list()] == ['Apple', 'Pineapple', 'Banana']


def test_hello_transforms_name_in_place(resource):
    # given
    greeting = Greeting(name='World')

    # when
    result = resource.hello(greeting)

    # then
    assert result is greeting
    assert result.name == 'Hello World'


def test_hello_delegates_to_service():
    service = MagicMock()
    service.greeting.return_value = 'transformed'
    resource = GreetingResource(service, seed_names=[])

    result = resource.hello(Greeting(name='X'))

    service.greeting.assert_called_once_with('X')
    assert result == Greeting(name='transformed')


def test_hello_does_not_change_the_collection(resource):
    resource.hello(Greeting(name='World'))
    resource.hello(Greeting(name='Apple'))

    assert [g.name for g in resource.list()] == ['Apple', 'Pineapple']


def test_hello_propagates_service_errors():
    service = MagicMock()
    service.greeting.side_effect = RuntimeError('service down')
    resource = GreetingResource(service, seed_names=[])

    with pytest.raises(RuntimeError, match='service down'):
        resource.hello(Greeting(name='World'))


def test_list_results_cannot_modify_the_collection(resource):
    resource.list()[0].name = 'Mango'

    assert [g.name for g in resource.list()] == ['Apple', 'Pineapple']


@pytest.mark.parametrize('greeting', [Greeting(), Greeting(name=None)])
def test_hello_passes_missing_name_to_service(greeting):
    service = MagicMock()
    service.greeting.return_value = 'Hello None'
    resource = GreetingResource(service, seed_names=[])

    result = resource.hello(greeting)

    service.greeting.assert_called_once_with(None)
    assert result.name == 'Hello None'


def test_seeding_goes_through_add(monkeypatch):
    added = []
    original_add = GreetingResource.add

    def recording_add(self, greeting):
        added.append(greeting.name)
        return original_add(self, greeting)

    monkeypatch.setattr(GreetingResource, 'add', recording_add)

    GreetingResource(MagicMock(), seed_names=['Apple', 'Pineapple'])

    assert added == ['Apple', 'Pineapple']
