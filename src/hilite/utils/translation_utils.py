#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# translation_utils.py - Utilities for translation support
#
import gettext
import os

# Default for system install; HILITE_LOCALEDIR overrides it for local builds
locale_dir = os.environ.get("HILITE_LOCALEDIR", "/usr/share/locale")

gettext.bindtextdomain("hilite", locale_dir)
gettext.textdomain("hilite")

# Export _ directly as the translation function
_ = gettext.gettext
