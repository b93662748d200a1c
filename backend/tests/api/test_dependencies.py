"""Tests for the service container."""

import pytest

from api.dependencies import ServiceContainer, get_container, reset_container
from modules.auth.interfaces import IAdminAuthorizer
from modules.guards.interfaces import IGuardService
from modules.messages.interfaces import IMessageService
from modules.users.interfaces import IUserService
from shared.database import DatabaseError


class TestServiceContainer:
    def test_services_implement_interfaces(self, container):
        assert isinstance(container.authorizer, IAdminAuthorizer)
        assert isinstance(container.users, IUserService)
        assert isinstance(container.messages, IMessageService)
        assert isinstance(container.guards, IGuardService)

    def test_services_are_cached(self, container):
        assert container.guards is container.guards
        assert container.users is container.users

    def test_authorizer_is_shared(self, container):
        assert container.authorizer is container.authorizer

    def test_reset_creates_new_instances(self, container):
        first = container.messages
        container.reset()
        assert container.messages is not first

    def test_store_required(self, settings):
        container = ServiceContainer(settings=settings)
        with pytest.raises(DatabaseError):
            container.users

    def test_attach_store(self, settings, store):
        container = ServiceContainer(settings=settings)
        container.attach_store(store)
        assert container.store is store


class TestContainerSingleton:
    def test_get_container_is_singleton(self):
        reset_container()
        try:
            assert get_container() is get_container()
        finally:
            reset_container()

    def test_reset_container(self):
        reset_container()
        try:
            first = get_container()
            reset_container()
            assert get_container() is not first
        finally:
            reset_container()
