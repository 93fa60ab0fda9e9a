#!/usr/bin/env python
# coding=utf-8

"""Run the cmudict_db command line interface."""

from .cli import main

main(prog_name="cmudict_db")
