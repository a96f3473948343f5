"""Protocol layer: capture tokenizer, command table, and event parser."""

from .tokenizer import ParseError, Tokenizer, tokenize
from .commands import Command, describe_command
from .parser import EventParser, iter_events, parse_events
