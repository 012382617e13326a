"""Dotted-path reflection: resolve, mutate and enumerate members."""

from .accessors import GETTER_PREFIXES as GETTER_PREFIXES
from .accessors import SETTER_PREFIXES as SETTER_PREFIXES
from .accessors import find_reader as find_reader
from .accessors import find_writer as find_writer
from .errors import *
from .fields import all_fields as all_fields
from .fields import all_of as all_of
from .fields import declared_fields as declared_fields
from .fields import fields_of_type as fields_of_type
from .fields import fields_with_marker as fields_with_marker
from .fields import is_instance_field as is_instance_field
from .fields import non_static_fields as non_static_fields
from .fields import of_type as of_type
from .fields import with_marker as with_marker
from .locator import ancestors as ancestors
from .locator import field_exists as field_exists
from .locator import find_field as find_field
from .locator import find_method as find_method
from .locator import get_field as get_field
from .locator import load_class as load_class
from .locator import locate as locate
from .locator import locate_method as locate_method
from .markers import has_marker as has_marker
from .markers import marked_field as marked_field
from .path import parse_path as parse_path
from .resolver import mutate as mutate
from .resolver import resolve as resolve
from .types import *
