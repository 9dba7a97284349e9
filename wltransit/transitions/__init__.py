"""
Transitions Package

Rewrites transition content: exception lists, the transition-op executor,
and loading of op batches from config.
"""

from .xlist import XListRole, filter_entries
from .trans_op import (
    TransOp,
    TransOpContext,
    copy_trans,
    select_copy_src,
    new_trans_op_context,
    exec_trans_op,
    exec_trans_ops,
)
from .op_config import TransOpConfig
