#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the cmsig package."

import logging

name = "cmsig"
__version__ = "2026.10.1"
__author__ = "The cmsig developers"
__author_email__ = "devs@cmsig.org"
__copyright__ = "Copyright (C) 2026 The cmsig developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
