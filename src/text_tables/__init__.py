"""Recognise, parse and re-align plain-text tables.

Submodules:
  table             -- Table model and the Parser / Stringifier / Locator contracts
  reader            -- line reader contract, positions and a string-backed reader
  cells             -- cell splitting and padding shared by the dialects
  detection         -- table boundary scan used by every locator
  patterns          -- border characters and line patterns
  restructuredtext  -- grid table dialect
  markdown          -- pipe table dialect
  org               -- Org-mode table dialect
  formats           -- mode -> dialect triad selection
  configuration     -- mode / show_status settings from the environment
  pipeline          -- the reformat operation
  cli               -- command-line front end
"""
