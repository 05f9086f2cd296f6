# SPDX-License-Identifier: MIT
"""Core target model, vendor resolution and source scanning."""
