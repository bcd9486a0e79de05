#!/usr/bin/env python
# coding=utf-8

"""Run the ipa_transcribers command line interface."""

from .cli import main


main()
