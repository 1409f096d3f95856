from bilancio.application.factories.client_factory import ClientFactory

__all__ = ["ClientFactory"]
