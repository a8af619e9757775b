from stepwise.reduced import Reduced, reduced, is_reduced, deref, ensure_reduced, unreduced
from stepwise.transformer import Transformer, Stage, UnsupportedInit, wrap, as_transformer, try_init
from stepwise.compose import compose
from stepwise.xforms import map, filter, remove, take, drop, appending, lines
from stepwise.transduce import reduce, transduce, fold, into, eduction
from stepwise.pipe import Pipe

__all__ = [
    'Reduced', 'reduced', 'is_reduced', 'deref', 'ensure_reduced', 'unreduced',
    'Transformer', 'Stage', 'UnsupportedInit', 'wrap', 'as_transformer', 'try_init',
    'compose',
    'map', 'filter', 'remove', 'take', 'drop', 'appending', 'lines',
    'reduce', 'transduce', 'fold', 'into', 'eduction',
    'Pipe',
]
