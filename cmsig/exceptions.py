#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by cmsig from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the cmsig versions are derived.

Unsuitable candidates met while searching for a curve are not errors:
they are signalled by None return values.
"""


class CMSigValueError(ValueError):
    pass


class CMSigTypeError(TypeError):
    pass


class CMSigRuntimeError(RuntimeError):
    pass


class SearchExhaustedError(CMSigRuntimeError):
    """A randomized search ran out of its attempt budget.

    This is not a proof that no solution exists:
    retrying with a larger budget may succeed.
    """
