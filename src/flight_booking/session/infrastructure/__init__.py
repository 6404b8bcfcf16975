from .key_value_session_store import KEY_PREFIX as KEY_PREFIX
from .key_value_session_store import KeyValueSessionStore as KeyValueSessionStore
from .key_value_store import KeyValueStore as KeyValueStore
from .key_value_store import KeyValueStoreError as KeyValueStoreError
from .key_value_store_factory import create_key_value_store as create_key_value_store
