"""Crisis records: the incidents relief operations are organised around."""
