from pydantic import BaseModel

from greeting_endpoint.config.base_settings import BaseServiceSettings
from greeting_endpoint.config.logger import LoggingSettings


class AppSettings(BaseModel):
    app_name: str
    # Path the greeting resource is mounted on
    resource_path: str = '/HttpExample'
    # Prepended to every name by the greeting service
    greeting_prefix: str = 'Hello '
    # Greetings the collection holds at startup, in order
    seed_names: list[str] = ['Apple', 'Pineapple']


class ServerSettings(BaseModel):
    host: str = '127.0.0.1'
    port: int = 8080


class ServiceSettings(BaseServiceSettings):
    logging: LoggingSettings
    main: AppSettings
    server: ServerSettings = ServerSettings()
